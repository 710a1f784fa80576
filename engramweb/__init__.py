"""Link safety, observation list helpers and an installer state model for an engram memory browser."""

__version__ = "0.1.0"