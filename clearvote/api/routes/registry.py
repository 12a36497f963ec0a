"""Voter registry API routes.

FastAPI router exposing the registry call surface under /v1/registry.
Mutations require the X-Caller-Identity header; reads do not.

Registry errors propagate to the application's exception handler, which
renders them as RFC 7807 problem details (see clearvote.api.main).

Self-service (/self), batch (/batch) and id lookup (/voter-ids) routes live
outside /voters/{voter}, so any identity string, including "me" or
"batch", addresses its own record.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from clearvote.api.dependencies.registry import (
    get_caller_identity,
    get_registry_service,
)
from clearvote.api.models.registry import (
    AddOfficialRequest,
    BatchRequest,
    BatchResponse,
    EligibilityResponse,
    MetadataHashRequest,
    NextIdResponse,
    OfficialStatusResponse,
    OperationResponse,
    PausedResponse,
    RegisterResponse,
    RegistryStatusResponse,
    ResetNextIdRequest,
    SetPausedRequest,
    TransferAdminRequest,
    VoterRecordResponse,
)
from clearvote.application.services.voter_registry_service import (
    VoterRegistryService,
)

router = APIRouter(prefix="/v1/registry", tags=["registry"])

Caller = Annotated[str, Depends(get_caller_identity)]
Registry = Annotated[VoterRegistryService, Depends(get_registry_service)]


# ========================================
# Administration
# ========================================


@router.post(
    "/admin/transfer",
    response_model=OperationResponse,
    summary="Transfer administrative control",
)
def transfer_admin(
    request: TransferAdminRequest, caller: Caller, service: Registry
) -> OperationResponse:
    return OperationResponse(success=service.transfer_admin(caller, request.new_admin))


@router.post(
    "/admin/pause",
    response_model=PausedResponse,
    summary="Set the global pause flag",
    description="Admin only. Allowed while paused, so the admin can always unpause.",
)
def set_paused(request: SetPausedRequest, caller: Caller, service: Registry) -> PausedResponse:
    return PausedResponse(paused=service.set_paused(caller, request.paused))


@router.post(
    "/admin/officials",
    response_model=OperationResponse,
    summary="Grant official authority",
)
def add_official(
    request: AddOfficialRequest, caller: Caller, service: Registry
) -> OperationResponse:
    return OperationResponse(success=service.add_official(caller, request.official))


@router.delete(
    "/admin/officials/{identity}",
    response_model=OperationResponse,
    summary="Withdraw official authority",
)
def remove_official(identity: str, caller: Caller, service: Registry) -> OperationResponse:
    return OperationResponse(success=service.remove_official(caller, identity))


@router.post(
    "/admin/next-id",
    response_model=NextIdResponse,
    summary="Move the id counter forward",
)
def reset_next_id(
    request: ResetNextIdRequest, caller: Caller, service: Registry
) -> NextIdResponse:
    return NextIdResponse(next_id=service.reset_next_id(caller, request.new_id))


# ========================================
# Voters: self-service
# ========================================


@router.post(
    "/voters",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register the caller as a pending voter",
)
def register(request: MetadataHashRequest, caller: Caller, service: Registry) -> RegisterResponse:
    return RegisterResponse(voter_id=service.register(caller, request.to_metadata_hash()))


@router.post(
    "/self/revoke",
    response_model=OperationResponse,
    summary="Revoke the caller's own registration",
)
def self_revoke(caller: Caller, service: Registry) -> OperationResponse:
    return OperationResponse(success=service.self_revoke(caller))


@router.put(
    "/self/metadata",
    response_model=OperationResponse,
    summary="Replace the caller's metadata hash",
)
def update_metadata(
    request: MetadataHashRequest, caller: Caller, service: Registry
) -> OperationResponse:
    return OperationResponse(
        success=service.update_metadata(caller, request.to_metadata_hash())
    )


# ========================================
# Voters: officials
# ========================================


@router.post(
    "/batch/approve",
    response_model=BatchResponse,
    summary="Approve several pending voters",
    description="Elements that cannot be approved are skipped; the count of approvals is returned.",
)
def batch_approve(request: BatchRequest, caller: Caller, service: Registry) -> BatchResponse:
    return BatchResponse(succeeded=service.batch_approve(caller, request.voters))


@router.post(
    "/batch/revoke",
    response_model=BatchResponse,
    summary="Revoke several voters",
    description="Elements that cannot be revoked are skipped; the count of revocations is returned.",
)
def batch_revoke(request: BatchRequest, caller: Caller, service: Registry) -> BatchResponse:
    return BatchResponse(succeeded=service.batch_revoke(caller, request.voters))


@router.post(
    "/voters/{voter}/approve",
    response_model=OperationResponse,
    summary="Approve a pending voter",
)
def approve(voter: str, caller: Caller, service: Registry) -> OperationResponse:
    return OperationResponse(success=service.approve(caller, voter))


@router.post(
    "/voters/{voter}/revoke",
    response_model=OperationResponse,
    summary="Revoke a voter",
)
def revoke(voter: str, caller: Caller, service: Registry) -> OperationResponse:
    return OperationResponse(success=service.revoke(caller, voter))


# ========================================
# Reads
# ========================================


@router.get(
    "/voter-ids/{voter_id}",
    response_model=VoterRecordResponse,
    summary="Get the record registered under an id",
)
def get_record_by_id(voter_id: int, service: Registry) -> VoterRecordResponse:
    return VoterRecordResponse.from_record(service.get_record_by_id(voter_id))


@router.get(
    "/voters/{voter}",
    response_model=VoterRecordResponse,
    summary="Get a voter record",
)
def get_record(voter: str, service: Registry) -> VoterRecordResponse:
    record = service.get_record(voter)
    if record is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Voter {voter} is not registered",
        )
    return VoterRecordResponse.from_record(record)


@router.get(
    "/voters/{voter}/eligibility",
    response_model=EligibilityResponse,
    summary="Check voter eligibility",
)
def is_eligible(voter: str, service: Registry) -> EligibilityResponse:
    return EligibilityResponse(voter=voter, eligible=service.is_eligible(voter))


@router.get(
    "/status",
    response_model=RegistryStatusResponse,
    summary="Get registry settings",
)
def get_status(service: Registry) -> RegistryStatusResponse:
    return RegistryStatusResponse(
        admin=service.get_admin(),
        paused=service.is_paused(),
        next_id=service.get_next_id(),
    )


@router.get(
    "/officials/{identity}",
    response_model=OfficialStatusResponse,
    summary="Get official membership and role",
)
def get_official_status(identity: str, service: Registry) -> OfficialStatusResponse:
    return OfficialStatusResponse(
        identity=identity,
        is_official=service.is_official(identity),
        role=service.resolve_role(identity).value,
    )
