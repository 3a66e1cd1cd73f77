"""UI label catalogues for the converter client, one JSON file per locale."""
