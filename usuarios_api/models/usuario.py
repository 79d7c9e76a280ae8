# usuarios_api/models/usuario.py
from sqlalchemy import Column, Integer, String, UniqueConstraint
from usuarios_api.db.base import Base

# largest value a signed 64-bit INTEGER column holds
MAX_USUARIO_ID = 2**63 - 1

EMAIL_CONSTRAINT = "uq_usuarios_email"


class Usuario(Base):
    __tablename__ = "usuarios"
    __table_args__ = (
        UniqueConstraint("email", name=EMAIL_CONSTRAINT),
        # SQLite: never hand out the id of a deleted row again
        {"sqlite_autoincrement": True},
    )

    id = Column(Integer, primary_key=True, index=True)
    full_name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, index=True)
    phone = Column(String(50), nullable=True)
    institution = Column(String(255), nullable=True)
    field_of_knowledge = Column(String(255), nullable=True)
    password_hash = Column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<Usuario id={self.id} email={self.email!r}>"
