"""Command line interface for Kafka Scaffold."""
