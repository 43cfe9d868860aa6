"""TTS MOS evaluation front-end: rating collection and aggregate results."""
