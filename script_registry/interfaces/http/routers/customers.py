"""Customer endpoints."""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from script_registry.interfaces.http.deps import get_customer_service
from script_registry.modules.common.exceptions import ConflictError, NotFoundError, ValidationError
from script_registry.modules.customers import CustomerService
from script_registry.schemas import CustomerCreate, CustomerResponse, SuccessResponse

router = APIRouter()


@router.get("", response_model=List[CustomerResponse], summary="List customers by name")
async def list_customers(service: CustomerService = Depends(get_customer_service)):
    return await service.list_customers()


@router.post(
    "",
    response_model=CustomerResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a customer",
)
async def create_customer(
    payload: CustomerCreate,
    service: CustomerService = Depends(get_customer_service),
):
    try:
        return await service.create_customer(payload.id, payload.name)
    except ValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except ConflictError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc


@router.delete("/{customer_id}", response_model=SuccessResponse, summary="Delete a customer")
async def delete_customer(customer_id: str, service: CustomerService = Depends(get_customer_service)):
    try:
        await service.delete_customer(customer_id)
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Customer not found") from exc
    return SuccessResponse(message="Customer deleted successfully")
