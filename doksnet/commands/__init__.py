"""Handlers for the new, add, edit, remove-failed, test and test-interactive commands."""