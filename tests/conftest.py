import pytest

@pytest.fixture
def paragraph():
    return (
        "The ancient manuscript revealed a forgotten story about a small village in "
        "the mountains. Every winter, when the snow reached the windowsills, the villagers would "
        "gather in the town hall to share tales and warm soup. They had a peculiar tradition of "
        "writing their hopes for spring on paper lanterns, which they would release into the night "
        "sky on the longest evening of winter. Year after year, this ritual brought the community "
        "together, creating bonds that lasted generations."
    )
