from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import InstrumentedAttribute

from app.models import Song, SEARCH_COLUMNS
from app.exceptions import SearchSongError, store_error_detail


class SongFilter:

    """
    搜索条件构造器。
    每个条件是 (列, 模式) 一对，渲染成 lower(列) LIKE lower(模式)，
    条件之间用 AND 连接。条件的顺序就是参数绑定的顺序。
    """

    def __init__(self):
        self.pairs: list[tuple[InstrumentedAttribute, str]] = []

    def add(self, column: InstrumentedAttribute, value: str | None) -> "SongFilter":
        # 空字符串和没传一样，不产生条件
        if value is None or value == "":
            return self
        self.pairs.append((column, f"%{value}%"))
        return self

    @classmethod
    def from_query(
        cls,
        title: str | None = None,
        artist: str | None = None,
        genre: str | None = None
    ) -> "SongFilter":
        values = {'title': title, 'artist': artist, 'genre': genre}
        song_filter = cls()
        for name, column in SEARCH_COLUMNS.items():
            song_filter.add(column, values[name])
        return song_filter

    def conditions(self) -> list:
        return [
            func.lower(column).like(func.lower(pattern))
            for column, pattern in self.pairs
        ]

    def params(self) -> list[str]:
        return [pattern for _, pattern in self.pairs]

    def __bool__(self) -> bool:
        return bool(self.pairs)

    def statement(self):
        stmt = select(Song)
        if self:
            stmt = stmt.where(*self.conditions())
        return stmt.order_by(Song.id)


async def search_songs(
    song_filter: SongFilter,
    session: AsyncSession
) -> list[Song]:
    try:
        result = await session.execute(song_filter.statement())
        return list(result.scalars().all())
    except SQLAlchemyError as e:
        raise SearchSongError(store_error_detail(e)) from e
