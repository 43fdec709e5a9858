from typing import List, Optional
import flet as ft

from gradecalc.core.gpa import parse_credits
from gradecalc.core.grades import GRADE_SYMBOLS
from gradecalc.state.calculator_state import CalculatorState, Course, CourseUpdateError


def format_index(value: Optional[float]) -> str:
    if value is None:
        return "-"
    return f"{value:.2f}"


def format_credits(value: float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def build_calculator_view(page: ft.Page, state: CalculatorState, title: str = "SPI and CPI Calculator") -> ft.View:
    status = ft.Text(color=ft.Colors.RED_400)
    course_rows = ft.Column(spacing=12)
    rendered_ids: List[int] = []

    spi_value = ft.Text(size=36, weight=ft.FontWeight.BOLD, color=ft.Colors.GREEN_600)
    spi_card = ft.Container(
        visible=False,
        padding=16,
        border_radius=8,
        bgcolor=ft.Colors.GREEN_50,
        content=ft.Column(
            controls=[ft.Text("Your SPI", size=20, weight=ft.FontWeight.W_600), spi_value],
            horizontal_alignment=ft.CrossAxisAlignment.CENTER,
        ),
    )

    current_cpi = ft.TextField(label="Current CPI", value=state.current_cpi, expand=True, keyboard_type=ft.KeyboardType.NUMBER)
    total_credits = ft.TextField(label="Total Credits", value=state.total_credits, expand=True, keyboard_type=ft.KeyboardType.NUMBER)
    new_cpi_value = ft.Text(size=36, weight=ft.FontWeight.BOLD, color=ft.Colors.BLUE_600)
    new_cpi_box = ft.Column(
        visible=False,
        controls=[ft.Text("Your New CPI", size=20, weight=ft.FontWeight.W_600), new_cpi_value],
        horizontal_alignment=ft.CrossAxisAlignment.CENTER,
    )

    def set_status(message: str, is_error: bool = True) -> None:
        status.value = message
        status.color = ft.Colors.RED_400 if is_error else ft.Colors.GREEN_400

    def apply_update(course_id: int, field_name: str, value: object) -> None:
        set_status("")
        try:
            state.update_course(course_id, field_name, value)
        except CourseUpdateError as exc:
            set_status(str(exc))
            page.update()

    def build_course_row(course: Course) -> ft.Row:
        def on_name_change(e) -> None:
            apply_update(course.id, "name", e.control.value or "")

        def on_credits_change(e) -> None:
            try:
                credits = parse_credits(e.control.value or "")
            except ValueError:
                set_status("Credits must be a number.")
                page.update()
                return
            apply_update(course.id, "credits", credits)

        def on_grade_change(e) -> None:
            apply_update(course.id, "grade", e.control.value)

        return ft.Row(
            controls=[
                ft.TextField(label="Course Name", value=course.name, expand=True, on_change=on_name_change),
                ft.TextField(
                    label="Credits",
                    value=format_credits(course.credits),
                    width=100,
                    keyboard_type=ft.KeyboardType.NUMBER,
                    on_change=on_credits_change,
                ),
                ft.Dropdown(
                    width=110,
                    label="Grade",
                    value=course.grade,
                    options=[ft.dropdown.Option(symbol) for symbol in GRADE_SYMBOLS],
                    on_change=on_grade_change,
                ),
                ft.IconButton(
                    icon=ft.Icons.DELETE,
                    icon_color=ft.Colors.RED_400,
                    tooltip="Remove course",
                    on_click=lambda _, course_id=course.id: state.remove_course(course_id),
                ),
            ],
        )

    def render_courses() -> None:
        course_rows.controls.clear()
        rendered_ids.clear()
        for course in state.courses:
            course_rows.controls.append(build_course_row(course))
            rendered_ids.append(course.id)

    def render_summary() -> None:
        spi_card.visible = state.spi is not None
        spi_value.value = format_index(state.spi)
        new_cpi_box.visible = state.new_cpi is not None
        new_cpi_value.value = format_index(state.new_cpi)

    def on_state_change(_: CalculatorState) -> None:
        # Rows are rebuilt only when courses come or go, so typing keeps focus.
        if rendered_ids != [course.id for course in state.courses]:
            render_courses()
        render_summary()
        page.update()

    def on_add(_) -> None:
        state.add_course()

    def on_calculate_cpi(_) -> None:
        state.calculate_cpi()

    current_cpi.on_change = lambda e: state.set_current_cpi(e.control.value or "")
    total_credits.on_change = lambda e: state.set_total_credits(e.control.value or "")

    state.subscribe(on_state_change)
    render_courses()
    render_summary()

    return ft.View(
        route="/",
        controls=[
            ft.AppBar(title=ft.Text(title)),
            ft.Container(
                padding=20,
                content=ft.Column(
                    scroll=ft.ScrollMode.AUTO,
                    controls=[
                        ft.Text(title, size=28, weight=ft.FontWeight.BOLD),
                        course_rows,
                        status,
                        ft.Row(
                            controls=[
                                ft.ElevatedButton("Add Course", icon=ft.Icons.ADD_CIRCLE_OUTLINE, on_click=on_add),
                                spi_card,
                            ],
                            alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
                        ),
                        ft.Divider(),
                        ft.Text("Calculate CPI", size=22, weight=ft.FontWeight.BOLD),
                        ft.Row(controls=[current_cpi, total_credits]),
                        ft.ElevatedButton("Calculate CPI", icon=ft.Icons.CALCULATE, on_click=on_calculate_cpi),
                        new_cpi_box,
                    ],
                ),
            ),
        ],
    )
