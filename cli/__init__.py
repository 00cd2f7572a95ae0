# CLI
