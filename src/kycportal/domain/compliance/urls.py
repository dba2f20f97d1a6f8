COMPLIANCE_OVERVIEW = "/api/compliance/overview"  # noqa: INP001
COMPLIANCE_STATS = "/api/compliance/stats"
