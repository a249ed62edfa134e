"""Platform integrations: logging and terminal input."""
