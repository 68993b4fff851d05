"""Sample data loaded into new sessions."""

SAMPLE_SEQUENCE = [1, 3, 5, 7, 9, 11, 13, 15, 17, 19, 23, 29, 31, 37, 41, 43, 47]

SAMPLE_ENTRIES = {
    "apple": "사과",
    "banana": "바나나",
    "cherry": "체리",
    "date": "대추야자",
    "elderberry": "엘더베리",
}

SAMPLE_WORDS = [
    "apple", "application", "apply", "appreciate", "approach",
    "banana", "band", "bank", "banner", "base",
    "cat", "car", "card", "care", "career", "careful",
    "dog", "door", "down", "download", "development",
    "elephant", "email", "example", "excellent", "experience",
]

SAMPLE_TEXTS = [
    "Hello world, this is a wonderful world!",
    "JavaScript programming is fun and rewarding",
    "Data structures and algorithms are important",
    "The quick brown fox jumps over the lazy dog",
    "Machine learning and artificial intelligence",
]
