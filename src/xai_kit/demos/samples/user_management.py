# Sample input for the improve_project demo. Deliberately rough.

users = []


def create_user(user_data):
    if user_data["name"] and user_data["email"]:
        user = {
            "name": user_data["name"],
            "email": user_data["email"],
            "age": user_data["age"],
            "role": user_data.get("role") or "user",
        }
        success = save_user_to_db(user)
        if success:
            return user
    return None


def save_user_to_db(user):
    print("Saving user to database:", user)
    users.append(user)
    return True


def get_user_by_id(id):
    for u in users:
        if u["id"] == id:
            return u
