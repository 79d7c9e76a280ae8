# usuarios_api/services/usuario_service.py
import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from usuarios_api.core.exceptions import (
    DuplicateEmailError,
    NotFoundError,
    StorageError,
    ValidationError,
)
from usuarios_api.core.security import PasswordHasher
from usuarios_api.models.usuario import EMAIL_CONSTRAINT, MAX_USUARIO_ID, Usuario
from usuarios_api.schemas.usuario import UsuarioCreate, UsuarioUpdate

logger = logging.getLogger(__name__)

# columns an update may touch besides the password
_UPDATABLE_FIELDS = ("full_name", "email", "phone", "institution", "field_of_knowledge")


def _is_email_conflict(exc: IntegrityError) -> bool:
    # PostgreSQL names the constraint; SQLite names the column
    message = str(exc.orig)
    return EMAIL_CONSTRAINT in message or "usuarios.email" in message


def _commit(db: Session, usuario: Usuario, *, action: str) -> Usuario:
    """
    Commit pending changes for ``usuario``.

    A violation of the email unique constraint means another row already
    owns the email (including a concurrent insert that slipped past the
    pre-check). Any other integrity violation is a storage error.
    """
    email = usuario.email
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        if _is_email_conflict(e):
            logger.warning(f"Duplicate email on {action}: {email!r}")
            raise DuplicateEmailError() from e
        raise StorageError(f"Erro ao {action} usuário.") from e
    except SQLAlchemyError as e:
        db.rollback()
        raise StorageError(f"Erro ao {action} usuário.") from e
    db.refresh(usuario)
    return usuario


def find_usuario_by_email(db: Session, email: str) -> Optional[Usuario]:
    return db.query(Usuario).filter(Usuario.email == email).first()


def create_usuario(
    db: Session,
    *,
    obj_in: UsuarioCreate,
    hasher: PasswordHasher,
) -> Usuario:
    """
    Register a usuario.

    - full_name, email and password are required and non-empty
    - email must not belong to any other usuario
    - the password is stored only as a bcrypt hash
    """
    if not obj_in.full_name or not obj_in.email or not obj_in.password:
        raise ValidationError()

    # 1. fast path; the unique constraint on email is authoritative
    if find_usuario_by_email(db, obj_in.email) is not None:
        raise DuplicateEmailError()

    # 2. store only the hash
    usuario = Usuario(
        full_name=obj_in.full_name,
        email=obj_in.email,
        phone=obj_in.phone,
        institution=obj_in.institution,
        field_of_knowledge=obj_in.field_of_knowledge,
        password_hash=hasher.hash(obj_in.password),
    )
    db.add(usuario)
    usuario = _commit(db, usuario, action="cadastrar")

    logger.info(f"Created usuario {usuario.id}")
    return usuario


def list_usuarios(db: Session) -> List[Usuario]:
    return db.query(Usuario).order_by(Usuario.id.asc()).all()


def get_usuario(db: Session, usuario_id: int) -> Usuario:
    # ids outside the column's range cannot exist and would overflow the driver
    if not 1 <= usuario_id <= MAX_USUARIO_ID:
        raise NotFoundError()
    usuario = db.get(Usuario, usuario_id)
    if usuario is None:
        raise NotFoundError()
    return usuario


def get_usuario_by_email(db: Session, email: str) -> Usuario:
    if not email:
        raise ValidationError("Email é obrigatório.")
    usuario = find_usuario_by_email(db, email)
    if usuario is None:
        raise NotFoundError()
    return usuario


def update_usuario(
    db: Session,
    *,
    usuario_id: int,
    obj_in: UsuarioUpdate,
    hasher: PasswordHasher,
) -> Usuario:
    """
    Apply a partial update. Each field changes only when it was sent with a
    non-null value; the password hash is replaced only when a new password
    is given.
    """
    usuario = get_usuario(db, usuario_id)

    update_data = {
        field: value
        for field, value in obj_in.model_dump(exclude_unset=True).items()
        if value is not None
    }
    # hash first: a rejected password must leave the row untouched
    if "password" in update_data:
        usuario.password_hash = hasher.hash(update_data["password"])

    for field in _UPDATABLE_FIELDS:
        if field in update_data:
            setattr(usuario, field, update_data[field])

    db.add(usuario)
    usuario = _commit(db, usuario, action="atualizar")

    logger.info(f"Updated usuario {usuario.id}: fields={sorted(update_data)}")
    return usuario


def delete_usuario(db: Session, usuario_id: int) -> None:
    usuario = get_usuario(db, usuario_id)
    db.delete(usuario)
    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        raise StorageError("Erro ao remover usuário.") from e
    logger.info(f"Deleted usuario {usuario_id}")


def authenticate_usuario(
    db: Session,
    email: str,
    password: str,
    *,
    hasher: PasswordHasher,
) -> Optional[Usuario]:
    usuario = find_usuario_by_email(db, email)
    if usuario is None:
        return None
    if not hasher.verify(password, usuario.password_hash):
        return None
    return usuario
