"""Receipt text extraction, warranty arithmetic and inventory matching."""
