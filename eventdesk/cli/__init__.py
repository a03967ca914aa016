"""
EventDesk CLI - command-line front-end for the EventAPI.

Commands:
- list: Show all events
- get: Look up one event by id
- add: Create an event
- update: Edit an existing event
- delete: Delete an event
- edit: Interactive form session
- config: Manage client configuration
"""
