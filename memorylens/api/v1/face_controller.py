# Standard library imports
from typing import List, Optional

# External package imports
from fastapi import APIRouter, Depends, File, Form, HTTPException, Response, UploadFile, status

# Local application imports
from ...application.dto.face_dto import FaceImageUpload, FaceRegistrationRequest, FaceResponse
from ...application.dto.user_dto import UserResponse
from ...application.use_cases.face.register_face import RegisterFaceUseCase
from ...application.use_cases.face.list_faces import ListFacesUseCase
from ...application.use_cases.face.delete_face import DeleteFaceUseCase
from ...di.container import get_container
from .dependencies import get_current_user


router = APIRouter(tags=["faces"])


async def read_face_uploads(files: Optional[List[UploadFile]]) -> List[FaceImageUpload]:
    """Read multipart uploads; empty file inputs are ignored."""
    uploads = []
    for upload in files or []:
        if not upload or not upload.filename:
            continue
        uploads.append(FaceImageUpload(
            filename=upload.filename,
            content_type=upload.content_type,
            content=await upload.read(),
        ))
    return uploads


@router.post("", response_model=FaceResponse, status_code=status.HTTP_201_CREATED)
async def register_face(
    name: str = Form(""),
    files: Optional[List[UploadFile]] = File(None),
    current_user: UserResponse = Depends(get_current_user),
) -> FaceResponse:
    """
    Train a face from three photos of one person.

    Args:
        name: Person's name
        files: The three photos, in order
    """
    container = get_container()
    register_use_case = container.get(RegisterFaceUseCase)

    request = FaceRegistrationRequest(name=name, images=await read_face_uploads(files))
    try:
        return await register_use_case.execute(request)
    except ValueError as exception:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exception)
        )
    except RuntimeError as exception:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=str(exception)
        )


@router.get("", response_model=List[FaceResponse])
async def list_faces(
    current_user: UserResponse = Depends(get_current_user),
) -> List[FaceResponse]:
    container = get_container()
    list_use_case = container.get(ListFacesUseCase)

    try:
        return await list_use_case.execute()
    except RuntimeError as exception:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(exception)
        )


@router.delete("/{face_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_face(
    face_id: str,
    current_user: UserResponse = Depends(get_current_user),
) -> Response:
    container = get_container()
    delete_use_case = container.get(DeleteFaceUseCase)

    try:
        await delete_use_case.execute(face_id)
    except ValueError as exception:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exception)
        )
    except RuntimeError as exception:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=str(exception)
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
