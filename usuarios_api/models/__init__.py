# Package marker
from usuarios_api.models.usuario import Usuario  # noqa
