# usuarios_api/db/base.py
from sqlalchemy.orm import declarative_base

# Models register themselves on import; see usuarios_api.models
Base = declarative_base()
