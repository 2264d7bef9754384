class SongStoreError(Exception):
    """
    数据库操作失败。由 main 中注册的处理器统一转成 {"error": message}。
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class AddSongError(SongStoreError):

    def __init__(self, detail: str | None = None):
        message = "Failed to add song"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class SearchSongError(SongStoreError):

    def __init__(self, detail: str):
        super().__init__(f"Failed to search songs: {detail}")


class SongNotFound(SongStoreError):

    def __init__(self, song_id: int):
        super().__init__("Song not found")
        self.song_id = song_id


def store_error_detail(e: Exception) -> str:
    """
    只取驱动层的错误信息，不带 SQL 语句和绑定参数。
    """
    orig = getattr(e, 'orig', None)
    return str(orig) if orig else str(e)
