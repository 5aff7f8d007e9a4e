"""Configuration services: probing, concern appliers, release and publishing."""
