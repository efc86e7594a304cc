"""Domain core: models, repositories, services, access control."""
