# usuarios_api/api/v1/endpoints/usuarios.py
from typing import List

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session

from usuarios_api.core.security import PasswordHasher, get_password_hasher
from usuarios_api.db.deps import get_db
from usuarios_api.models.usuario import MAX_USUARIO_ID
from usuarios_api.schemas.usuario import (
    EmailExistsRequest,
    EmailExistsResponse,
    MessageResponse,
    UsuarioCreate,
    UsuarioMessage,
    UsuarioPublic,
    UsuarioUpdate,
    to_public,
)
from usuarios_api.services import usuario_service

# NOTE: no endpoint here is authenticated
router = APIRouter(prefix="/usuarios", tags=["usuarios"])


@router.post("", response_model=UsuarioMessage, status_code=status.HTTP_201_CREATED)
def create_usuario(
    obj_in: UsuarioCreate,
    db: Session = Depends(get_db),
    hasher: PasswordHasher = Depends(get_password_hasher),
):
    usuario = usuario_service.create_usuario(db, obj_in=obj_in, hasher=hasher)
    return UsuarioMessage(
        message="Usuário cadastrado com sucesso!",
        user=to_public(usuario),
    )


@router.get("", response_model=List[UsuarioPublic])
def list_usuarios(db: Session = Depends(get_db)):
    return [to_public(u) for u in usuario_service.list_usuarios(db)]


@router.post("/exists", response_model=EmailExistsResponse)
def usuario_exists(payload: EmailExistsRequest, db: Session = Depends(get_db)):
    """
    Existence check by email. Absence is a normal answer, not a 404.
    """
    usuario = usuario_service.find_usuario_by_email(db, payload.email)
    if usuario is None:
        return EmailExistsResponse(exists=False)
    return EmailExistsResponse(exists=True, user=to_public(usuario))


@router.get("/email/{email}", response_model=UsuarioPublic)
def get_usuario_by_email(email: str, db: Session = Depends(get_db)):
    return to_public(usuario_service.get_usuario_by_email(db, email))


@router.get("/{usuario_id}", response_model=UsuarioPublic)
def get_usuario(
    usuario_id: int = Path(ge=1, le=MAX_USUARIO_ID),
    db: Session = Depends(get_db),
):
    return to_public(usuario_service.get_usuario(db, usuario_id))


@router.put("/{usuario_id}", response_model=UsuarioMessage)
def update_usuario(
    obj_in: UsuarioUpdate,
    usuario_id: int = Path(ge=1, le=MAX_USUARIO_ID),
    db: Session = Depends(get_db),
    hasher: PasswordHasher = Depends(get_password_hasher),
):
    usuario = usuario_service.update_usuario(
        db, usuario_id=usuario_id, obj_in=obj_in, hasher=hasher
    )
    return UsuarioMessage(message="Usuário atualizado.", user=to_public(usuario))


@router.delete("/{usuario_id}", response_model=MessageResponse)
def delete_usuario(
    usuario_id: int = Path(ge=1, le=MAX_USUARIO_ID),
    db: Session = Depends(get_db),
):
    usuario_service.delete_usuario(db, usuario_id)
    return MessageResponse(message="Usuário removido com sucesso.")
