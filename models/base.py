from datetime import datetime, timezone

from sqlalchemy import DateTime
from sqlalchemy.orm import DeclarativeBase, declared_attr
from sqlalchemy.types import TypeDecorator

from utils.money import utc_now


class UTCDateTime(TypeDecorator):
     """
     Timezone-aware UTC datetime stored as a naive UTC value.

     Works the same on SQLite (which drops tzinfo) and SQL Server.
     """
     impl = DateTime
     cache_ok = True

     def process_bind_param(self, value, dialect):
          if value is None:
               return None
          if value.tzinfo is not None:
               value = value.astimezone(timezone.utc)
          return value.replace(tzinfo=None)

     def process_result_value(self, value, dialect):
          if value is None:
               return None
          if isinstance(value, datetime) and value.tzinfo is None:
               return value.replace(tzinfo=timezone.utc)
          return value


class Base(DeclarativeBase):
     """
     Base class for all SQLAlchemy models.
     Provides common configuration and mixins.
     """

     @declared_attr.directive
     def __tablename__(cls) -> str:
          """
          Automatically generate table name from class name.
          Example: LedgerEntry -> ledger_entries
          """
          import re
          name = re.sub(r'(?<!^)(?=[A-Z])', '_', cls.__name__).lower()
          # Pluralize (simple version)
          if name.endswith('y'):
               return name[:-1] + 'ies'
          elif name.endswith('s'):
               return name + 'es'
          return name + 's'
