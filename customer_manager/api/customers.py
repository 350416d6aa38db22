"""
Customer routes

CRUD endpoints over the customer service.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Response, status

from customer_manager.api.deps import get_customer_service
from customer_manager.application.dtos.customer_dtos import (
    CustomerCreateRequest,
    CustomerResponse,
    CustomerUpdateRequest,
    ErrorResponse,
)
from customer_manager.application.services.customer_service import CustomerService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/customers", tags=["customers"])

_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}
_CONFLICT = {status.HTTP_409_CONFLICT: {"model": ErrorResponse}}


@router.get("", response_model=List[CustomerResponse])
async def list_customers(service: CustomerService = Depends(get_customer_service)):
    """List all customers"""
    customers = await service.get_all()
    return [CustomerResponse.from_entity(customer) for customer in customers]


@router.get("/{customer_id}", response_model=CustomerResponse, responses=_NOT_FOUND)
async def get_customer(
    customer_id: int, service: CustomerService = Depends(get_customer_service)
):
    """Get one customer"""
    customer = await service.get_customer_by_id(customer_id)
    return CustomerResponse.from_entity(customer)


@router.post(
    "",
    response_model=CustomerResponse,
    status_code=status.HTTP_201_CREATED,
    responses=_CONFLICT,
)
async def create_customer(
    request: CustomerCreateRequest,
    service: CustomerService = Depends(get_customer_service),
):
    """Create a customer"""
    customer = await service.add(request.to_entity())
    return CustomerResponse.from_entity(customer)


@router.put(
    "/{customer_id}",
    response_model=CustomerResponse,
    responses={**_NOT_FOUND, **_CONFLICT},
)
async def update_customer(
    customer_id: int,
    request: CustomerUpdateRequest,
    service: CustomerService = Depends(get_customer_service),
):
    """Replace a customer's details"""
    customer = await service.update(request.to_entity(customer_id))
    return CustomerResponse.from_entity(customer)


@router.delete(
    "/{customer_id}", status_code=status.HTTP_204_NO_CONTENT, responses=_NOT_FOUND
)
async def delete_customer(
    customer_id: int, service: CustomerService = Depends(get_customer_service)
):
    """Delete a customer"""
    await service.delete(customer_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
