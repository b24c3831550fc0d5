"""
brand-signals: rule-based brand intelligence extraction for LLM answers.

Given a target brand, a list of known competitors and one LLM response,
extracts brand mentions, list rankings and competitor (known and newly
discovered) positions. See brand_signals.extractor for the public API.
"""
