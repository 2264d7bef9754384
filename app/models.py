from sqlalchemy import Integer, Text, text
from sqlalchemy.orm import Mapped, mapped_column, DeclarativeBase


class Base(DeclarativeBase):
    pass


class Song(Base):
    """
    歌曲
    """
    __tablename__ = "songs"
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    artist: Mapped[str] = mapped_column(Text, nullable=False)
    genre: Mapped[str] = mapped_column(Text, nullable=False)
    play_count: Mapped[int] = mapped_column(Integer, server_default=text("0"))


# 搜索时允许过滤的列，顺序即绑定顺序
SEARCH_COLUMNS = {
    'title': Song.title,
    'artist': Song.artist,
    'genre': Song.genre,
}
