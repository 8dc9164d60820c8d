"""Install npm-two-stage over an npm installation, and take it away again."""

__version__ = "0.1.0"
