#!/usr/bin/env python3
import os
from typing import Optional

import click
import httpx
from rich.console import Console
from rich.table import Table

console = Console()

API_BASE_URL = os.getenv("VOLLEYTRACK_API_URL", "http://localhost:8000")
CATEGORIES_PATH = "/api/admin/workout-categories"

DIFFICULTY_STYLES = {"easy": "green", "medium": "yellow", "challenging": "red"}


def client() -> httpx.Client:
    return httpx.Client(base_url=API_BASE_URL, timeout=10.0)


def report_error(e: httpx.HTTPError):
    if isinstance(e, httpx.HTTPStatusError):
        try:
            body = e.response.json()
        except ValueError:
            body = {}
        console.print(f"[red]Error:[/red] {body.get('message', e)}")
        for detail in body.get("details", []):
            field = detail.get("field") or "request"
            console.print(f"  {field}: {detail['message']}")
    else:
        console.print(f"[red]Error:[/red] {e}")


@click.group()
def cli():
    """VolleyTrack admin CLI"""
    pass


@cli.command()
@click.option('--query', 'search', help='Filter by name or focus area')
@click.option('--limit', default=50, help='Number of results')
def categories(search: Optional[str], limit: int):
    """List workout categories"""
    params = {"limit": limit}
    if search:
        params["query"] = search

    try:
        with client() as http:
            response = http.get(CATEGORIES_PATH, params=params)
            response.raise_for_status()
        data = response.json()

        if not data["categories"]:
            console.print("[yellow]No categories found[/yellow]")
            return

        table = Table(title=f"Workout Categories ({data['total']})")
        table.add_column("ID", style="cyan")
        table.add_column("Name", style="white")
        table.add_column("Focus Area", style="magenta")
        table.add_column("Exercises", justify="right")

        for category in data["categories"]:
            table.add_row(
                category["id"],
                category["name"],
                category["focusArea"],
                str(category["exerciseCount"]),
            )

        console.print(table)
    except httpx.HTTPError as e:
        report_error(e)


@cli.command()
@click.argument('category_id')
def show(category_id: str):
    """Show a category with its exercises in order"""
    try:
        with client() as http:
            response = http.get(f"{CATEGORIES_PATH}/{category_id}")
            response.raise_for_status()
        category = response.json()

        console.print(f"[bold]{category['name']}[/bold] - {category['focusArea']}")
        console.print(f"  {category['keyObjective']}")

        table = Table()
        table.add_column("#", justify="right")
        table.add_column("Exercise", style="white")
        table.add_column("Sets x Reps")
        table.add_column("Difficulty")

        for exercise in category["exercises"]:
            style = DIFFICULTY_STYLES.get(exercise["difficulty"], "white")
            table.add_row(
                str(exercise["order"] + 1),
                exercise["name"],
                f"{exercise['sets']} x {exercise['repetitions']}",
                f"[{style}]{exercise['difficulty']}[/{style}]",
            )

        console.print(table)
    except httpx.HTTPError as e:
        report_error(e)


@cli.command()
@click.argument('name')
@click.option('--focus-area', required=True, help='Training focus, e.g. "Lower Body Power"')
@click.option('--objective', required=True, help='Key objective of the category')
def add_category(name: str, focus_area: str, objective: str):
    """Create a workout category"""
    payload = {"name": name, "focusArea": focus_area, "keyObjective": objective}
    try:
        with client() as http:
            response = http.post(CATEGORIES_PATH, json=payload)
            response.raise_for_status()
        data = response.json()
        console.print(f"[green]✓[/green] Created category: {data['name']}")
        console.print(f"  ID: {data['id']}")
    except httpx.HTTPError as e:
        report_error(e)


@cli.command()
@click.argument('category_id')
@click.argument('name')
@click.option('--sets', type=int, required=True, help='Number of sets (1-10)')
@click.option('--reps', required=True, help='Repetitions, e.g. "8-12"')
@click.option('--difficulty', type=click.Choice(['easy', 'medium', 'challenging']), default='medium')
@click.option('--description', help='Optional coaching notes')
def add_exercise(category_id: str, name: str, sets: int, reps: str, difficulty: str, description: Optional[str]):
    """Add an exercise to the end of a category"""
    payload = {"name": name, "sets": sets, "repetitions": reps, "difficulty": difficulty}
    if description:
        payload["description"] = description

    try:
        with client() as http:
            response = http.post(f"{CATEGORIES_PATH}/{category_id}/exercises", json=payload)
            response.raise_for_status()
        data = response.json()
        console.print(f"[green]✓[/green] Added exercise: {data['name']} (position {data['order'] + 1})")
    except httpx.HTTPError as e:
        report_error(e)


@cli.command()
@click.argument('category_id')
def delete_category(category_id: str):
    """Delete a category and its exercises"""
    if click.confirm(f"Delete category {category_id}?"):
        try:
            with client() as http:
                response = http.delete(f"{CATEGORIES_PATH}/{category_id}")
                response.raise_for_status()
            console.print(f"[green]✓[/green] Deleted category {category_id}")
        except httpx.HTTPError as e:
            report_error(e)


@cli.command()
@click.argument('candidate')
def password(candidate: str):
    """Rate a password the way the sign-up form does"""
    try:
        with client() as http:
            response = http.post("/api/password-strength", json={"password": candidate})
            response.raise_for_status()
        data = response.json()
        console.print(f"Strength: [bold]{data['label'] or '-'}[/bold] ({data['score']}/4)")
        for item in data["feedback"]:
            console.print(f"  • {item}")
    except httpx.HTTPError as e:
        report_error(e)


if __name__ == '__main__':
    cli()
