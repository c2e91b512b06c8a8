"""
WhatsApp Models
===============
Typed request and response structures for the diagnosticMKt template.
"""

from typing import Any, Dict, Literal, Optional, Tuple
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict

from .constants import (
    DEFAULT_LANGUAGE_CODE,
    HEADER_DOCUMENT_FILENAME,
    HEADER_DOCUMENT_LINK,
    MESSAGE_TYPE,
    MESSAGING_PRODUCT,
    TEMPLATE_NAME,
)


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class TextParameter(_Frozen):
    """A body placeholder value ({{1}}..{{5}})."""
    type: Literal["text"] = "text"
    text: Optional[str]


class DocumentMedia(_Frozen):
    link: Literal[HEADER_DOCUMENT_LINK] = HEADER_DOCUMENT_LINK
    filename: Literal[HEADER_DOCUMENT_FILENAME] = HEADER_DOCUMENT_FILENAME


class DocumentParameter(_Frozen):
    type: Literal["document"] = "document"
    document: DocumentMedia = DocumentMedia()


class HeaderComponent(_Frozen):
    type: Literal["header"] = "header"
    parameters: Tuple[DocumentParameter] = (DocumentParameter(),)


class BodyComponent(_Frozen):
    type: Literal["body"] = "body"
    parameters: Tuple[
        TextParameter, TextParameter, TextParameter, TextParameter, TextParameter
    ]


class Language(_Frozen):
    code: Optional[str] = DEFAULT_LANGUAGE_CODE


class Template(_Frozen):
    name: Literal[TEMPLATE_NAME] = TEMPLATE_NAME
    language: Language = Language()
    components: Tuple[HeaderComponent, BodyComponent]


class TemplateRequest(_Frozen):
    """
    Outgoing diagnosticMKt template message.

    The template name and the header document are fixed; only the
    recipient, the five body values and the language vary per call.
    """
    messaging_product: Literal[MESSAGING_PRODUCT] = MESSAGING_PRODUCT
    to: str
    type: Literal[MESSAGE_TYPE] = MESSAGE_TYPE
    template: Template

    @classmethod
    def build(
        cls,
        to_phone_number: str,
        customer_name: Optional[str],
        doctor_consultation_discount: Optional[str],
        doctor_coupon_code: Optional[str],
        health_checkup_discount: Optional[str],
        diagnostic_coupon_code: Optional[str],
        language_code: Optional[str] = DEFAULT_LANGUAGE_CODE,
    ) -> "TemplateRequest":
        body = BodyComponent(
            parameters=tuple(
                TextParameter(text=value)
                for value in (
                    customer_name,
                    doctor_consultation_discount,
                    doctor_coupon_code,
                    health_checkup_discount,
                    diagnostic_coupon_code,
                )
            )
        )
        return cls(
            to=to_phone_number,
            template=Template(
                language=Language(code=language_code),
                components=(HeaderComponent(), body),
            ),
        )

    def to_payload(self) -> Dict[str, Any]:
        """Return the Graph API JSON object tree."""
        return self.model_dump(mode="json")

    def to_json(self) -> str:
        return self.model_dump_json()


@dataclass
class ApiResponse:
    """Raw Graph API reply."""
    status_code: int
    body: str
    reason: Optional[str] = None

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code <= 299
