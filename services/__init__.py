"""Author and book workflows (validate-then-persist, one transaction each)."""
