from typing import List
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from types_boto3_dynamodb.service_resource import Table
else:
    Table = object


def query_all(table: Table, key_condition, consistent: bool = False) -> List[dict]:
    """Run a key query and follow ``LastEvaluatedKey`` until the last page."""
    resp = table.query(KeyConditionExpression=key_condition, ConsistentRead=consistent)
    items = resp.get("Items", [])
    while "LastEvaluatedKey" in resp:
        resp = table.query(
            KeyConditionExpression=key_condition,
            ConsistentRead=consistent,
            ExclusiveStartKey=resp["LastEvaluatedKey"],
        )
        items.extend(resp.get("Items", []))
    return items
