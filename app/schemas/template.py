"""Message template resource and its request/response schemas."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import Annotated

from fastapi import Body
from pydantic import BaseModel, ConfigDict, Field

from app.errors import InternalError, InvalidResource
from app.schemas.resource import ResourceKind

# Opening of a named definition, e.g. `{{ define "name" }}` or `{{define`.
# Only ASCII blanks may sit between the braces and the keyword.
DEFINE_PATTERN = r"\{\{[\t\n\f\r ]*define"

# Characters trimmed from both ends of a body: Unicode White_Space, which
# unlike str.strip() leaves the \x1c-\x1f separators in place.
TRIM_CHARS = (
    "\t\n\v\f\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


@dataclass(frozen=True)
class MessageTemplate:
    """A notification message template, keyed by name."""

    name: str
    template: str

    def resource_type(self) -> str:
        return ResourceKind.TEMPLATE

    def resource_id(self) -> str:
        return self.name

    def validate(self) -> MessageTemplate:
        """Return a copy whose body is a named definition block.

        A body that already contains a ``define`` is only trimmed. Anything
        else is indented by two spaces per line and wrapped in
        ``{{ define "<name>" }}`` / ``{{ end }}``.

        The emptiness checks run on the raw values, so a whitespace-only
        body is accepted and wraps to an empty block.
        """
        if self.name == "":
            raise InvalidResource("template must have a name")
        if self.template == "":
            raise InvalidResource("template must have content")

        content = self.template.strip(TRIM_CHARS)
        try:
            found = re.search(DEFINE_PATTERN, content) is not None
        except re.error as exc:
            raise InternalError(f"failed to match regex: {exc}") from exc

        if not found:
            indented = "\n".join("  " + line for line in content.split("\n"))
            content = f'{{{{ define "{self.name}" }}}}\n{indented}\n{{{{ end }}}}'

        return replace(self, template=content)


# ── Wire schemas ─────────────────────────────────────────────────────


class MessageTemplateContent(BaseModel):
    """PUT body; the template name travels in the path."""

    model_config = ConfigDict(populate_by_name=True)

    # A missing key decodes as "" so validation reports it, not the parser.
    template: str = Field("", alias="Template")


MessageTemplatePayload = Annotated[
    MessageTemplateContent,
    Body(description="Template body. Bare content is wrapped in a define block named after the template."),
]


class MessageTemplateResponse(BaseModel):
    name: str = Field(serialization_alias="Name")
    template: str = Field(serialization_alias="Template")

    model_config = {"from_attributes": True}


class SyncResponse(BaseModel):
    created: list[str]
    updated: list[str]
    failed: list[str]
    message: str
