DOCUMENT_LIST = "/api/documents"  # noqa: INP001
DOCUMENT_CREATE = "/api/documents"
DOCUMENT_DETAIL = "/api/documents/{document_id:uuid}"
DOCUMENT_UPDATE = "/api/documents/{document_id:uuid}"
DOCUMENT_DELETE = "/api/documents/{document_id:uuid}"
DOCUMENT_TYPE_UPDATE = "/api/documents/{document_id:uuid}/type"
