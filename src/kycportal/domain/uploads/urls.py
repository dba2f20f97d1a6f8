UPLOAD_LIST = "/api/uploads"  # noqa: INP001
UPLOAD_CREATE = "/api/companies/{company_id:uuid}/documents/{document_id:uuid}/uploads"
UPLOAD_DETAIL = "/api/uploads/{upload_id:uuid}"
UPLOAD_SIGNED_URL = "/api/uploads/{upload_id:uuid}/signed-url"
UPLOAD_CONTENT = "/api/uploads/{upload_id:uuid}/content"
UPLOAD_EXTRACTED_DETAILS = "/api/uploads/{upload_id:uuid}/extracted-details"
UPLOAD_DELETE = "/api/uploads/{upload_id:uuid}"
UPLOAD_VERSION = "/api/uploads/{upload_id:uuid}/version"
