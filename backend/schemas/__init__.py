"""schemas — request/response models and shared records."""
