"""
Trainer - conversational daily check-in intake and safety-gated workout plans.
"""
