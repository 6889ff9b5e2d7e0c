"""Version 1 of the Contacts API."""
