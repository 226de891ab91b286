"""Library for tokenizing recurrence rule text."""
