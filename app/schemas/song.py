from pydantic import BaseModel, ConfigDict


class SongIn(BaseModel):
    """
    新增歌曲的请求体。不做校验，缺字段交给数据库的 NOT NULL 约束。
    id 和 play_count 由数据库生成，请求里带了也忽略。
    """
    model_config = ConfigDict(extra='ignore')

    title: str | None = None
    artist: str | None = None
    genre: str | None = None


class SongOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    artist: str
    genre: str
    play_count: int


class ErrorOut(BaseModel):
    error: str
