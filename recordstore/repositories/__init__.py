"""
Persistence adapters.

json_storage turns JSON documents into Records and back; memory_repository
holds the live set. Services depend on the repository, never on the file.
"""
