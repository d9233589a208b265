"""
The `logger` package provides the logging façade offered to host applications.

Contents
--------
- custom_logger
    ``CustomLogger`` plus its handlers:
        * ``ColorFormatter`` — colored console lines per level
        * ``ShutdownFileHandler`` — in-memory buffer written to a timestamped file on shutdown
        * ``DiscordWebhookHandler`` — posts ERROR records to a Discord webhook with requests
"""
