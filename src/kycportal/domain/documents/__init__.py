"""KYC document definition catalog."""
