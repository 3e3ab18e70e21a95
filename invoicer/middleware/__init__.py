"""HTTP middleware for the Invoicer API."""
