"""Output layer — Rich/JSON rendering of ServiceResult and console hooks."""
