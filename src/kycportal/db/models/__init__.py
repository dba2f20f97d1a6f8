from .company import Company
from .document_type import DocumentType
from .kyc_document import KYCDocument
from .kyc_upload import KYCUpload
from .upload_version import UploadVersion

__all__ = ["Company", "DocumentType", "KYCDocument", "KYCUpload", "UploadVersion"]
