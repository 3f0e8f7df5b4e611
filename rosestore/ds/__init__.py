"""In-memory hash, set, list and sorted set structures."""