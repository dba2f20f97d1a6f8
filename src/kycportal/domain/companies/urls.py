COMPANY_LIST = "/api/companies"  # noqa: INP001
COMPANY_CREATE = "/api/companies"
COMPANY_DETAIL = "/api/companies/{company_id:uuid}"
COMPANY_UPDATE = "/api/companies/{company_id:uuid}"
COMPANY_DELETE = "/api/companies/{company_id:uuid}"
COMPANY_MISSING_DOCUMENTS = "/api/companies/{company_id:uuid}/missing-documents"
