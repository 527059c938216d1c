"""Walk a race weekend: meetings -> sessions -> drivers, weather and race control."""

import asyncio

from openf1_wrapper import AsyncOpenF1Client, OpenF1Client


def main() -> None:
    with OpenF1Client() as f1:
        print("=== 2023 Meetings ===")
        meetings = f1.get_meetings_for_year(2023)
        for m in meetings[:5]:
            print(f"  {m.meeting_key}: {m.meeting_name} - {m.location}, {m.country_name}")

        if not meetings:
            print("  No meetings found.")
            return

        meeting = meetings[0]
        print(f"\n=== Sessions for {meeting.meeting_name} ===")
        sessions = f1.get_sessions_for_meeting(meeting)
        for s in sessions:
            print(f"  {s.session_key}: {s.session_name} ({s.session_type}) from {s.date_start}")

        race = next((s for s in sessions if s.session_type == "Race"), None)
        if race is None:
            print("  No race session found.")
            return

        print(f"\n=== Drivers (session_key={race.session_key}) ===")
        for d in sorted(f1.get_drivers_for_session(race), key=lambda x: x.driver_number or 0):
            print(f"  #{d.driver_number} {d.full_name} - {d.team_name}")

        print("\n=== Weather at the start ===")
        weather = f1.get_weather_for_session(race)
        if weather is None:
            print("  No weather sample in the first five minutes.")
        else:
            print(f"  Air: {weather.air_temperature}°C, Track: {weather.track_temperature}°C")
            print(f"  Humidity: {weather.humidity}%, Rain: {weather.rainfall}")

        print("\n=== Race control, laps 1-5 ===")
        for event in f1.get_race_control_for_session_until_lap(race, 5):
            print(f"  Lap {event.lap_number} [{event.category}] {event.message}")


async def main_async() -> None:
    async with AsyncOpenF1Client() as f1:
        meetings = await f1.get_meetings_for_query("year=2023&country_name=Bahrain")
        print(f"\n{len(meetings)} Bahrain meeting(s) in 2023 (async)")


if __name__ == "__main__":
    main()
    asyncio.run(main_async())
