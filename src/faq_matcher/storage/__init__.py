"""Storage layer for the intent catalog."""

from faq_matcher.storage.intent_catalog import IntentCatalog, QuickReply

__all__ = ["IntentCatalog", "QuickReply"]
