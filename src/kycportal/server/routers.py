"""Application Modules."""

from __future__ import annotations

from typing import TYPE_CHECKING

from kycportal.domain.companies.controller import CompanyController
from kycportal.domain.compliance.controllers import ComplianceController
from kycportal.domain.dispatch.controller import DispatchController
from kycportal.domain.documents.controller import KYCDocumentController
from kycportal.domain.system.controllers import SystemController
from kycportal.domain.uploads.controller import UploadController

if TYPE_CHECKING:
    from litestar.types import ControllerRouterHandler

route_handlers: list[ControllerRouterHandler] = [
    SystemController,
    CompanyController,
    KYCDocumentController,
    UploadController,
    ComplianceController,
    DispatchController,
]
