from task_dashboard.schema import Task


def make_task(task_id="t", name="Task", status=None, priority=None, due=None, project=(), last_touched="", source=None):
    return Task(
        id=task_id,
        name=name,
        status=status,
        priority=priority,
        due=due,
        project=tuple(project),
        last_touched=last_touched,
        source=source,
    )


def notion_page(page_id, name=None, status=None, priority=None, due=None, projects=None, edited=None, source=None):
    def select(value):
        return {"select": {"name": value, "color": "default"} if value is not None else None}

    properties = {
        "Name": {"title": [{"plain_text": name}] if name is not None else []},
        "Status": select(status),
        "Priority": select(priority),
        "Due": {"date": {"start": due} if due is not None else None},
        "Project": {"relation": [{"id": pid} for pid in (projects or [])]},
        "Source": select(source),
    }
    if edited is not None:
        properties["Last Touched"] = {"last_edited_time": edited}
    return {"id": page_id, "properties": properties}
