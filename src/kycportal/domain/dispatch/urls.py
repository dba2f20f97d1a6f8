DISPATCH_DOCUMENTS = "/api/companies/{company_id:uuid}/dispatch"  # noqa: INP001
