"""
Tasks - Command implementations for the mint bot.

Each module corresponds to a top-level CLI command:
- mint:   Send the SBT mint transaction
- verify: Submit the signed verification claim
"""
