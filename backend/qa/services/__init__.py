# Services package init
"""
Q&A Questions — Services Layer
===============================

What:  Business logic sitting between the embedding application and the database.
How:   Services accept a session plus plain values or schemas, apply the
       lifecycle rules, and return ORM objects or read models.

Service Inventory:
    - QuestionService: create/update/delete pipeline, favorites, counters, relations
    - TagService:      global tag frequency bookkeeping
    - FavoriteService: user bookmarks
    - VoteService:     vote cleanup for deleted questions
    - AnswerService:   answer CRUD and the question's answer counter
    - IdentityService: user id → display name
"""
