"""MindOS: personal notes with semantic search, chat, and digests."""
