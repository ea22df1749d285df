"""Todo backend: REST controller for tasks"""
