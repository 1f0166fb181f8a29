# tests/utils.py

# ISBN-13 values with valid check digits, with and without hyphens
VALID_ISBNS = [
    "978-3-16-148410-0",
    "9780306406157",
    "978-1-86197-271-2",
    "9780131103627",
    "978-0-596-00712-6",
    "9781449355739",
]
