"""FastAPI entry point - thin layer over the domain."""

import asyncio
import dataclasses
import logging
from typing import Any

from fastapi import FastAPI, HTTPException, WebSocket, WebSocketDisconnect
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from core.clock import ClockRegistry
from core.errors import FireDrillError
from core.models import RoomType
from data import create_sample_building
from simulation import DEFAULT_SIM_CONFIG, FacilitySimulation

logging.basicConfig(level=logging.WARNING, format="%(name)s | %(message)s")
logging.getLogger("simulation.facility").setLevel(logging.INFO)
logging.getLogger("core.zones.building").setLevel(logging.INFO)


class BuildingSummary(BaseModel):
    name: str
    floors: int
    summary: str


class FloorSummary(BaseModel):
    floor_number: int
    width: float
    length: float
    available_area: float
    occupied_area: float
    rooms: int
    summary: str


class SensorSummary(BaseModel):
    kind: str
    current_reading: int
    hazard_level: int
    summary: str


class RoomSummary(BaseModel):
    room_number: int
    type: RoomType
    area: float
    fire_drill: bool
    sensors: list[SensorSummary]
    summary: str


class AdvanceRequest(BaseModel):
    units: int = Field(default=1, ge=1, le=DEFAULT_SIM_CONFIG.max_advance_units)


class FireDrillRequest(BaseModel):
    room_type: RoomType | None = None


class FireDrillStatus(BaseModel):
    room_type: RoomType | None
    rooms_in_drill: int


def _default_simulation() -> FacilitySimulation:
    clock = ClockRegistry()
    return FacilitySimulation(create_sample_building(clock), clock)


def _rooms_in_drill(simulation: FacilitySimulation) -> int:
    return sum(
        1 for floor in simulation.building.floors for room in floor.rooms if room.fire_drill_ongoing()
    )


def create_app(simulation: FacilitySimulation | None = None) -> FastAPI:
    sim = simulation if simulation is not None else _default_simulation()
    building = sim.building

    app = FastAPI(title="Facility Simulation API")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/building")
    def get_building() -> BuildingSummary:
        return BuildingSummary(name=building.name, floors=len(building.floors), summary=str(building))

    @app.get("/snapshot")
    def get_snapshot() -> dict[str, Any]:
        return dataclasses.asdict(sim.snapshot())

    @app.get("/alarms")
    def get_alarms() -> list[dict[str, Any]]:
        return [dataclasses.asdict(alarm) for alarm in sim.alarms()]

    @app.get("/floors/{floor_number}")
    def get_floor(floor_number: int) -> FloorSummary:
        floor = building.get_floor_by_number(floor_number)
        if floor is None:
            raise HTTPException(status_code=404, detail=f"Floor {floor_number} not found")
        return FloorSummary(
            floor_number=floor.floor_number,
            width=floor.width,
            length=floor.length,
            available_area=floor.available_area,
            occupied_area=floor.occupied_area(),
            rooms=len(floor.rooms),
            summary=str(floor),
        )

    @app.get("/floors/{floor_number}/rooms/{room_number}")
    def get_room(floor_number: int, room_number: int) -> RoomSummary:
        floor = building.get_floor_by_number(floor_number)
        room = floor.get_room_by_number(room_number) if floor is not None else None
        if room is None:
            raise HTTPException(status_code=404, detail=f"Room {room_number} on floor {floor_number} not found")
        levels = room.hazard_levels()
        return RoomSummary(
            room_number=room.room_number,
            type=room.type,
            area=room.area,
            fire_drill=room.fire_drill_ongoing(),
            sensors=[
                SensorSummary(
                    kind=str(sensor.kind),
                    current_reading=sensor.current_reading,
                    hazard_level=levels[sensor.kind],
                    summary=str(sensor),
                )
                for sensor in room.sensors
            ],
            summary=str(room),
        )

    @app.post("/clock/advance")
    def advance_clock(request: AdvanceRequest) -> dict[str, Any]:
        try:
            snapshot = sim.advance(request.units)
        except ValueError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        return dataclasses.asdict(snapshot)

    @app.post("/fire-drill")
    def start_fire_drill(request: FireDrillRequest) -> FireDrillStatus:
        try:
            building.fire_drill(request.room_type)
        except FireDrillError as exc:
            raise HTTPException(status_code=409, detail=str(exc)) from exc
        return FireDrillStatus(room_type=request.room_type, rooms_in_drill=_rooms_in_drill(sim))

    @app.post("/fire-drill/cancel")
    def cancel_fire_drill() -> FireDrillStatus:
        building.cancel_fire_drill()
        return FireDrillStatus(room_type=None, rooms_in_drill=_rooms_in_drill(sim))

    @app.websocket("/ws")
    async def websocket_endpoint(websocket: WebSocket) -> None:
        await websocket.accept()
        try:
            while True:
                update = sim.step()
                await websocket.send_json(dataclasses.asdict(update))
                await asyncio.sleep(sim.config.stream_interval_s)
        except WebSocketDisconnect:
            pass

    return app


app = create_app()
