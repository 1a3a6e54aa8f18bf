"""NiN auto-link: bind brokered identities to local accounts by national identity number."""
