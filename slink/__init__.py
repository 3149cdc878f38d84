"""slink: deterministic short codes and a bounded shortening history."""
