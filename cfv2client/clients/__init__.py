from cfv2client.clients.cf import CFClient, CFError  # noqa: F401
