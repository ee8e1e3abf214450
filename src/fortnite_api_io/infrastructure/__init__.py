"""Infrastructure layer: endpoint URL builders and HTTP request execution."""
