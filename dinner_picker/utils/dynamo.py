"""
DynamoDB utility functions for data access.
"""
import os
from typing import Dict, List, Optional, Any
import boto3
from boto3.dynamodb.conditions import Key

# Partition holding every recipe; sort keys order them by creation time
RECIPES_PK = "RECIPES"

# Sort key of the per-user session item
SESSION_SK = "SESSION"

# Singleton instance
_dynamo_instance = None

def get_dynamo() -> 'DynamoDBClient':
    """
    Get or create singleton DynamoDB client instance.

    Example:
        dynamo = get_dynamo()
        item = dynamo.get_item({"PK": "USER#123", "SK": "SESSION"})

    Returns:
        DynamoDBClient: Singleton instance of DynamoDB client

    Raises:
        EnvironmentError: If RECIPES_TABLE_NAME environment variable is not set
    """
    global _dynamo_instance
    if _dynamo_instance is None:
        try:
            table_name = os.environ['RECIPES_TABLE_NAME']
        except KeyError:
            raise EnvironmentError(
                "RECIPES_TABLE_NAME environment variable not set. "
                "This variable must be set to the DynamoDB table name."
            )
        _dynamo_instance = DynamoDBClient(table_name)
    return _dynamo_instance

class DynamoDBClient:
    """Client for interacting with DynamoDB table."""

    def __init__(self, table_name: str):
        self.dynamodb = boto3.resource('dynamodb')
        self.table = self.dynamodb.Table(table_name)

    def put_item(self, item: Dict[str, Any]) -> Dict[str, Any]:
        """
        Put a single item into the table.

        Args:
            item: Dictionary containing item attributes

        Returns:
            Response from DynamoDB
        """
        return self.table.put_item(Item=item)

    def get_item(self, key: Dict[str, str]) -> Optional[Dict[str, Any]]:
        """
        Get a single item from the table.

        Args:
            key: Dictionary containing partition key and sort key

        Returns:
            Item if found, None otherwise
        """
        response = self.table.get_item(Key=key)
        return response.get('Item')

    def query_items(
        self,
        partition_key: str,
        partition_value: str,
        sort_key_condition: Optional[Key] = None,
        scan_index_forward: bool = True
    ) -> List[Dict[str, Any]]:
        """
        Query all items using partition key and optional sort key condition.

        Follows LastEvaluatedKey so callers always get the full result set.

        Args:
            partition_key: Name of partition key
            partition_value: Value of partition key
            sort_key_condition: Optional sort key condition
            scan_index_forward: False to return items in descending sort key order

        Returns:
            List of matching items
        """
        key_condition = Key(partition_key).eq(partition_value)
        if sort_key_condition:
            key_condition = key_condition & sort_key_condition

        query_args: Dict[str, Any] = {
            "KeyConditionExpression": key_condition,
            "ScanIndexForward": scan_index_forward
        }
        items: List[Dict[str, Any]] = []
        while True:
            response = self.table.query(**query_args)
            items.extend(response.get('Items', []))
            last_key = response.get('LastEvaluatedKey')
            if not last_key:
                return items
            query_args["ExclusiveStartKey"] = last_key

    def update_item(
        self,
        key: Dict[str, str],
        update_expression: str,
        expression_values: Dict[str, Any],
        expression_names: Optional[Dict[str, str]] = None
    ) -> Dict[str, Any]:
        """
        Update an item in the table, creating it if it does not exist.

        Args:
            key: Dictionary containing partition key and sort key
            update_expression: Update expression
            expression_values: Expression attribute values
            expression_names: Optional expression attribute names

        Returns:
            Response from DynamoDB
        """
        update_args: Dict[str, Any] = {
            "Key": key,
            "UpdateExpression": update_expression,
            "ExpressionAttributeValues": expression_values,
            "ReturnValues": "ALL_NEW"
        }
        if expression_names:
            update_args["ExpressionAttributeNames"] = expression_names
        return self.table.update_item(**update_args)

def create_pk(user_id: str) -> str:
    """Create partition key from user ID."""
    return f"USER#{user_id}"

def create_recipe_sk(created_at: str, recipe_id: str) -> str:
    """
    Create sort key for a recipe item.

    The creation timestamp leads so that a descending query over the
    recipes partition returns the newest recipes first.

    Args:
        created_at: ISO format timestamp of creation
        recipe_id: Recipe identifier

    Returns:
        Sort key in format "RECIPE#{created_at}#{recipe_id}"
    """
    return f"RECIPE#{created_at}#{recipe_id}"
