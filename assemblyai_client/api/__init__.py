"""AssemblyAI HTTP layer: request executor, resource clients, and models.

RULES:
- All HTTP calls go through RawClient (no direct httpx usage elsewhere)
- Authentication is the raw API key in the Authorization header
"""

from assemblyai_client.api.client import AssemblyAIClient
from assemblyai_client.api.files import FilesClient
from assemblyai_client.api.lemur import LemurClient
from assemblyai_client.api.raw_client import RawClient
from assemblyai_client.api.realtime import RealtimeClient
from assemblyai_client.api.transcripts import TranscriptsClient

__all__ = [
    "AssemblyAIClient",
    "FilesClient",
    "LemurClient",
    "RawClient",
    "RealtimeClient",
    "TranscriptsClient",
]
