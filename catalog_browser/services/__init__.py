"""Application services layer (use cases).

Use cases name the application-level operations the presenters invoke. They
avoid UI concerns and add nothing on top of the repository.
"""
