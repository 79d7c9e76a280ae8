# usuarios_api/schemas/usuario.py
from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from usuarios_api.models.usuario import Usuario

# JSON bodies use camelCase (fullName, fieldOfKnowledge); snake_case is accepted too
_camel = ConfigDict(alias_generator=to_camel, populate_by_name=True)

# older clients send "field" instead of "fieldOfKnowledge"
_field_of_knowledge_alias = AliasChoices("fieldOfKnowledge", "field", "field_of_knowledge")


class UsuarioCreate(BaseModel):
    full_name: str = Field(min_length=1)
    email: str = Field(min_length=1)
    phone: str | None = None
    institution: str | None = None
    field_of_knowledge: str | None = Field(
        default=None, validation_alias=_field_of_knowledge_alias
    )
    password: str = Field(min_length=1)

    model_config = _camel


class UsuarioUpdate(BaseModel):
    """
    Partial update. A field left out of the body (or sent as null) keeps
    its stored value; ``model_fields_set`` tells the two cases apart.
    """
    full_name: str | None = Field(default=None, min_length=1)
    email: str | None = Field(default=None, min_length=1)
    phone: str | None = None
    institution: str | None = None
    field_of_knowledge: str | None = Field(
        default=None, validation_alias=_field_of_knowledge_alias
    )
    password: str | None = Field(default=None, min_length=1)

    model_config = _camel


class UsuarioPublic(BaseModel):
    """Outward-facing usuario: never carries the password hash."""
    id: int
    full_name: str
    email: str
    phone: str | None = None
    institution: str | None = None
    field_of_knowledge: str | None = None

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class UsuarioMessage(BaseModel):
    message: str
    user: UsuarioPublic


class MessageResponse(BaseModel):
    message: str


class EmailExistsRequest(BaseModel):
    email: str = Field(min_length=1)


class EmailExistsResponse(BaseModel):
    exists: bool
    user: UsuarioPublic | None = None


def to_public(usuario: Usuario) -> UsuarioPublic:
    return UsuarioPublic.model_validate(usuario)
