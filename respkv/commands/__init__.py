"""Command objects that run against a Store, one module per command."""