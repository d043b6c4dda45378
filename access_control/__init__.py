"""Access-control service: role creation with hierarchical permission grants."""
