# remote_config: remote-configuration admin service for mobile apps
__version__ = "1.0.0"
