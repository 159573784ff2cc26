"""Aggregation pipeline for the task listing endpoint."""
from backend.models.task_model import ALL, PRIORITIES

RANK_FIELD = "priorityRank"


def build_task_filter(priority=None, status=None):
    match = {}
    if priority and priority != ALL:
        match["priority"] = priority
    if status and status != ALL:
        match["status"] = status
    return match


def priority_rank_stage(order=None):
    """``$addFields`` stage ranking tasks by priority.

    ``desc`` ranks High first and ``asc`` ranks Low first. Unknown
    priorities get the last rank either way.
    """
    ordered = PRIORITIES if order == "desc" else tuple(reversed(PRIORITIES))
    branches = [
        {"case": {"$eq": ["$priority", priority]}, "then": rank}
        for rank, priority in enumerate(ordered, start=1)
    ]
    return {
        "$addFields": {
            RANK_FIELD: {"$switch": {"branches": branches, "default": len(ordered) + 1}}
        }
    }


def build_task_pipeline(priority=None, status=None, sort_by=None, order=None):
    pipeline = [{"$match": build_task_filter(priority, status)}]
    direction = -1 if order == "desc" else 1

    if sort_by == "priority":
        pipeline.append(priority_rank_stage(order))
        pipeline.append({"$sort": {RANK_FIELD: 1}})
        pipeline.append({"$project": {RANK_FIELD: 0}})
    elif sort_by == "dueDate":
        pipeline.append({"$sort": {"dueDate": direction}})
    else:
        pipeline.append({"$sort": {"createdAt": -1}})
    return pipeline
