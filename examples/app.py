"""
Example chart service using svgview with FastAPI.

Run with:
    uvicorn examples.app:app --reload
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from fastapi import APIRouter, FastAPI
from pydantic import BaseModel

from svgview import View, either, for_each, group
from svgview.attributes import font_family, font_size, stroke
from svgview.elements import circle, g, line, rect, svg, text, title
from svgview.fastapi import SVGRoute

logger = logging.getLogger(__name__)

router = APIRouter(route_class=SVGRoute)


# Models


class User(BaseModel):
    id: int
    username: str
    commits: int = 0


# Fake async data layer


async def get_leaderboard() -> list[User]:
    return [
        User(id=2, username="alice", commits=98),
        User(id=1, username="bob", commits=42),
        User(id=3, username="charlie", commits=35),
    ]


# Components


@dataclass(frozen=True)
class Bar(View):
    index: int
    label: str
    value: int
    unit: float

    @property
    def body(self):
        y = 30 + self.index * 30
        length = self.value * self.unit
        return g(
            text(self.label, x=0, y=y + 15),
            rect(x=80, y=y, width=length, height=20).fill("#4f46e5"),
            text(self.value, x=85 + length, y=y + 15).fill("#374151"),
        )


@dataclass(frozen=True)
class BarChart(View):
    heading: str
    users: tuple[User, ...]
    chart_width: int = 400

    @property
    def body(self):
        top = max((u.commits for u in self.users), default=0)
        unit = (self.chart_width - 140) / top if top else 0
        height = 40 + len(self.users) * 30
        return svg(
            title(self.heading),
            font_family("sans-serif"),
            font_size(12),
            text(self.heading, x=0, y=15).font_weight("bold"),
            either(
                self.users,
                lambda: for_each(
                    enumerate(self.users),
                    lambda pair: Bar(pair[0], pair[1].username, pair[1].commits, unit),
                ),
                text("No commits yet", x=0, y=45),
            ),
            line(stroke("#9ca3af"), x1=80, y1=25, x2=80, y2=height),
            xmlns="http://www.w3.org/2000/svg",
            width=self.chart_width,
            height=height,
            view_box=f"0 0 {self.chart_width} {height}",
        )


def status_dot(ok: bool) -> View:
    return group(
        title("ok" if ok else "down"),
        circle(cx=8, cy=8, r=6).fill("#16a34a" if ok else "#dc2626"),
    )


# Routes


@router.get("/leaderboard.svg")
async def leaderboard(width: int = 400):
    users = await get_leaderboard()
    logger.info(f"rendering leaderboard for {len(users)} users")
    return BarChart("Commits", tuple(users), chart_width=width)


@router.get("/status/{name}.svg")
async def status(name: str):
    return svg(status_dot(name != "down"), width=16, height=16)


app = FastAPI()
app.include_router(router)
