"""Tokenizer, ignored-region detection, mentions and command parsing for comments."""