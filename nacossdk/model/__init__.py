"""Data models for configurations and services."""