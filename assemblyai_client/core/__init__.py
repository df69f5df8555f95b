"""Pure helpers with no HTTP knowledge: audio sources, parameter building, polling."""

from assemblyai_client.core.params import build_params, create_transcript_params, parse_list_url
from assemblyai_client.core.polling import wait_until_terminal
from assemblyai_client.core.sources import AudioSource, AudioStream, LocalFile, RemoteUrl, as_audio_source

__all__ = [
    "AudioSource",
    "AudioStream",
    "LocalFile",
    "RemoteUrl",
    "as_audio_source",
    "build_params",
    "create_transcript_params",
    "parse_list_url",
    "wait_until_terminal",
]
