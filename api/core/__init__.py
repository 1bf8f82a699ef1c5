"""
Process-wide plumbing for the motor registry: environment settings, the
asyncpg pool and its request dependency, and logging setup. SQL for the
`motors` table lives in `motors/repository.py`, not here.
"""
