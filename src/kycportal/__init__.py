"""KYC document compliance portal."""
