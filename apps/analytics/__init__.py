"""Product analytics for fetch outcomes."""
