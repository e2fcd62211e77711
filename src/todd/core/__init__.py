"""Core components: GitHub client, workspaces, workflows and notifications."""
