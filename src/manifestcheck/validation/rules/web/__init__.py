"""Rules loaded only when the ``web`` platform is requested."""
