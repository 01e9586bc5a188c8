"""Core building blocks: crypto, transport, session, node tree and copy pipeline."""
