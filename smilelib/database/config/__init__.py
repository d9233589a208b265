"""
The `config` package provides two core building blocks for establishing database connections.

Contents:
    - config: Configuration layer - strongly typed settings loaded from environment variables (with .env support), exposed through a singleton Settings object
    - connection_engine: Database layer - SQLAlchemy bootstrap that constructs a connection URL from a DatabaseProfile and opens one unpooled connection per call

Together they provide environment-driven configuration and a single entry point for opening connections.
"""
