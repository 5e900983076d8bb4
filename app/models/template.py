"""Message template ORM model — the at-rest form of a provisioned template."""

from datetime import datetime

from sqlalchemy import DateTime, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class MessageTemplateRow(Base):
    __tablename__ = "message_templates"

    name: Mapped[str] = mapped_column(String(128), primary_key=True)
    template: Mapped[str] = mapped_column(Text)  # always a normalized define block
    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, server_default=func.now(), onupdate=func.now()
    )
