"""Life Lessons API: lesson listing, engagement and user ledger service."""
