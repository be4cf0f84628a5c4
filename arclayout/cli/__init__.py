"""Command-line subcommands for arclayout"""
