"""
WhatsApp Template Constants
===========================
Fixed values of the diagnosticMKt template message.
"""

GRAPH_API_BASE_URL = "https://graph.facebook.com/v20.0/"
MESSAGES_PATH = "/messages"

MESSAGING_PRODUCT = "whatsapp"
MESSAGE_TYPE = "template"

TEMPLATE_NAME = "diagnosticMKt"
DEFAULT_LANGUAGE_CODE = "en"

HEADER_DOCUMENT_LINK = "https://chandandocs.s3.ap-south-1.amazonaws.com/ChandanProfile.pdf"
HEADER_DOCUMENT_FILENAME = "ChandanProfile.pdf"

JSON_CONTENT_TYPE = "application/json; charset=utf-8"
