"""Class Attendance package.

Feature modules (attendance, schedules, storage) sit behind a thin Flask
controller layer; business rules live in pure calculator functions and a small
service that reads and writes through an injected record store.
"""
