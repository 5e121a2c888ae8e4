"""
Outbound integrations.

Narrow clients for the services this API talks to: SMTP for account
emails, the mods catalog and the CDN administration API.  Services
receive them through their constructors, so tests can pass fakes.
"""
