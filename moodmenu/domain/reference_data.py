from __future__ import annotations

from typing import Any

DEFAULT_USERS: list[dict[str, str]] = [
    {"email": "test@user.com", "password": "test", "role": "user"},
    {"email": "admin@user.com", "password": "admin", "role": "admin"},
]

RECIPES: list[dict[str, Any]] = [
    # Happy
    {
        "name": "Rainbow Veggie Pasta",
        "mood": "happy",
        "ingredients": "Pasta, Bell peppers (red, yellow, orange), Cherry tomatoes, Zucchini, "
        "Olive oil, Garlic, Parmesan cheese, Fresh basil",
        "instructions": "1. Cook pasta according to package directions. 2. Sauté colorful "
        "vegetables in olive oil with garlic. 3. Toss pasta with vegetables. 4. Top with "
        "parmesan and fresh basil.",
        "prep_time": "25 minutes",
        "servings": 4,
        "image": "🌈🍝",
    },
    {
        "name": "Sunshine Smoothie Bowl",
        "mood": "happy",
        "ingredients": "Frozen mango, Banana, Orange juice, Greek yogurt, Granola, Fresh berries, "
        "Coconut flakes",
        "instructions": "1. Blend mango, banana, orange juice, and yogurt until smooth. 2. Pour "
        "into a bowl. 3. Top with granola, berries, and coconut flakes.",
        "prep_time": "10 minutes",
        "servings": 2,
        "image": "🌞🥣",
    },
    {
        "name": "Celebration Cupcakes",
        "mood": "happy",
        "ingredients": "Flour, Sugar, Butter, Eggs, Vanilla extract, Baking powder, Milk, "
        "Colorful frosting, Sprinkles",
        "instructions": "1. Mix dry ingredients. 2. Beat butter, sugar, and eggs. 3. Combine and "
        "add milk. 4. Bake at 350°F for 18-20 minutes. 5. Cool and frost with colorful frosting "
        "and sprinkles.",
        "prep_time": "45 minutes",
        "servings": 12,
        "image": "🧁✨",
    },
    {
        "name": "Unicorn Pancakes",
        "mood": "happy",
        "ingredients": "Pancake mix, Food coloring (pink, purple, blue), Whipped cream, Rainbow "
        "sprinkles, Mini marshmallows, Edible glitter",
        "instructions": "1. Divide pancake batter into 3 bowls and color each. 2. Cook small "
        "colorful pancakes. 3. Stack them up alternating colors. 4. Top with whipped cream, "
        "sprinkles, marshmallows, and edible glitter.",
        "prep_time": "20 minutes",
        "servings": 3,
        "image": "🦄🥞",
    },
    {
        "name": "Tropical Paradise Poke Bowl",
        "mood": "happy",
        "ingredients": "Sushi rice, Fresh tuna, Mango chunks, Pineapple, Edamame, Sesame seeds, "
        "Ponzu sauce, Macadamia nuts, Crispy wontons",
        "instructions": "1. Cook and season sushi rice. 2. Cube fresh tuna and marinate in ponzu. "
        "3. Arrange rice, tuna, tropical fruits, and toppings in bowl. 4. Drizzle with extra "
        "ponzu and top with nuts.",
        "prep_time": "25 minutes",
        "servings": 2,
        "image": "🌺🍚",
    },
    # Sad
    {
        "name": "Comfort Mac & Cheese",
        "mood": "sad",
        "ingredients": "Elbow macaroni, Butter, Flour, Milk, Cheddar cheese, Mozzarella, Salt, "
        "Pepper, Breadcrumbs",
        "instructions": "1. Cook macaroni. 2. Make cheese sauce with butter, flour, milk, and "
        "cheeses. 3. Mix pasta with sauce. 4. Top with breadcrumbs and bake at 350°F for 20 "
        "minutes.",
        "prep_time": "40 minutes",
        "servings": 6,
        "image": "🧀🍝",
    },
    {
        "name": "Warm Chocolate Chip Cookies",
        "mood": "sad",
        "ingredients": "Butter, Brown sugar, White sugar, Eggs, Vanilla, Flour, Baking soda, "
        "Salt, Chocolate chips",
        "instructions": "1. Cream butter and sugars. 2. Add eggs and vanilla. 3. Mix in dry "
        "ingredients. 4. Fold in chocolate chips. 5. Bake at 375°F for 10-12 minutes.",
        "prep_time": "30 minutes",
        "servings": 24,
        "image": "🍪❤️",
    },
    {
        "name": "Chicken Noodle Soup",
        "mood": "sad",
        "ingredients": "Chicken breast, Egg noodles, Carrots, Celery, Onion, Chicken broth, "
        "Garlic, Bay leaf, Parsley",
        "instructions": "1. Sauté vegetables in pot. 2. Add chicken broth and bring to boil. "
        "3. Add chicken and simmer 20 minutes. 4. Shred chicken, return to pot with noodles. "
        "5. Cook until noodles are tender.",
        "prep_time": "45 minutes",
        "servings": 6,
        "image": "🍲💛",
    },
    {
        "name": "Grandma's Cinnamon Roll Bread Pudding",
        "mood": "sad",
        "ingredients": "Day-old cinnamon rolls, Eggs, Heavy cream, Vanilla, Nutmeg, Butter, "
        "Caramel sauce, Ice cream",
        "instructions": "1. Cube cinnamon rolls. 2. Whisk eggs, cream, vanilla, and nutmeg. "
        "3. Pour over bread, let soak 30 minutes. 4. Bake at 350°F for 45 minutes. 5. Serve "
        "warm with caramel sauce and ice cream.",
        "prep_time": "90 minutes",
        "servings": 8,
        "image": "🥐💝",
    },
    {
        "name": "Ultimate Grilled Cheese & Tomato Soup",
        "mood": "sad",
        "ingredients": "Sourdough bread, Gruyere cheese, Sharp cheddar, Butter, San Marzano "
        "tomatoes, Heavy cream, Basil, Garlic, Onion",
        "instructions": "1. Make soup: sauté onion and garlic, add tomatoes and simmer 30 min, "
        "blend with cream and basil. 2. Grill sandwich with mixed cheeses on buttered bread "
        "until golden. 3. Cut sandwich into strips for dipping.",
        "prep_time": "45 minutes",
        "servings": 4,
        "image": "🧀🍅",
    },
    # Energetic
    {
        "name": "Power Protein Bowl",
        "mood": "energetic",
        "ingredients": "Quinoa, Grilled chicken, Avocado, Chickpeas, Spinach, Cherry tomatoes, "
        "Lemon tahini dressing",
        "instructions": "1. Cook quinoa. 2. Grill and slice chicken. 3. Arrange quinoa, chicken, "
        "chickpeas, and vegetables in bowl. 4. Drizzle with tahini dressing.",
        "prep_time": "30 minutes",
        "servings": 2,
        "image": "💪🥗",
    },
    {
        "name": "Energy Breakfast Burrito",
        "mood": "energetic",
        "ingredients": "Whole wheat tortillas, Scrambled eggs, Black beans, Avocado, Salsa, "
        "Cheese, Bell peppers, Onions",
        "instructions": "1. Scramble eggs with peppers and onions. 2. Warm tortillas. 3. Layer "
        "eggs, beans, avocado, cheese, and salsa. 4. Roll up and enjoy!",
        "prep_time": "15 minutes",
        "servings": 2,
        "image": "🌯⚡",
    },
    {
        "name": "Spicy Thai Stir-Fry",
        "mood": "energetic",
        "ingredients": "Rice noodles, Shrimp or tofu, Bell peppers, Snap peas, Thai basil, Soy "
        "sauce, Chili paste, Garlic, Ginger",
        "instructions": "1. Cook noodles. 2. Stir-fry protein with garlic and ginger. 3. Add "
        "vegetables and sauce. 4. Toss with noodles and basil.",
        "prep_time": "25 minutes",
        "servings": 4,
        "image": "🍜🔥",
    },
    {
        "name": "Dragon Fruit Açaí Power Smoothie",
        "mood": "energetic",
        "ingredients": "Frozen açaí, Dragon fruit, Banana, Spinach, Chia seeds, Almond butter, "
        "Protein powder, Coconut water, Bee pollen",
        "instructions": "1. Blend açaí, dragon fruit, banana, spinach, and coconut water. 2. Add "
        "protein powder and almond butter. 3. Top with chia seeds and bee pollen. 4. Enjoy "
        "immediately!",
        "prep_time": "10 minutes",
        "servings": 2,
        "image": "🐉💪",
    },
    {
        "name": "Firecracker Shrimp Lettuce Wraps",
        "mood": "energetic",
        "ingredients": "Large shrimp, Butter lettuce, Sriracha, Honey, Lime juice, Garlic, "
        "Ginger, Bell peppers, Crushed peanuts, Cilantro",
        "instructions": "1. Make firecracker sauce with sriracha, honey, and lime. 2. Stir-fry "
        "shrimp with garlic and ginger. 3. Toss with sauce and peppers. 4. Serve in lettuce "
        "cups with peanuts and cilantro.",
        "prep_time": "20 minutes",
        "servings": 4,
        "image": "🔥🥬",
    },
    # Relaxed
    {
        "name": "Lavender Honey Tea",
        "mood": "relaxed",
        "ingredients": "Water, Dried lavender, Honey, Lemon, Fresh mint",
        "instructions": "1. Boil water and steep lavender for 5 minutes. 2. Strain into cup. "
        "3. Add honey and lemon. 4. Garnish with mint.",
        "prep_time": "10 minutes",
        "servings": 1,
        "image": "🍵💜",
    },
    {
        "name": "Mediterranean Mezze Platter",
        "mood": "relaxed",
        "ingredients": "Hummus, Pita bread, Cucumber, Cherry tomatoes, Olives, Feta cheese, "
        "Tzatziki, Grapes",
        "instructions": "1. Arrange hummus and tzatziki in small bowls. 2. Cut vegetables and "
        "pita. 3. Arrange everything on a large platter. 4. Enjoy slowly!",
        "prep_time": "15 minutes",
        "servings": 4,
        "image": "🫒🧘",
    },
    {
        "name": "Herb Roasted Salmon",
        "mood": "relaxed",
        "ingredients": "Salmon fillets, Dill, Lemon, Olive oil, Garlic, Asparagus, White wine",
        "instructions": "1. Season salmon with herbs, garlic, and lemon. 2. Arrange asparagus "
        "around salmon. 3. Drizzle with olive oil and wine. 4. Bake at 400°F for 15-18 minutes.",
        "prep_time": "25 minutes",
        "servings": 4,
        "image": "🐟🌿",
    },
    {
        "name": "Zen Garden Buddha Bowl",
        "mood": "relaxed",
        "ingredients": "Brown rice, Roasted sweet potato, Edamame, Purple cabbage, Cucumber "
        "ribbons, Pickled ginger, Sesame dressing, Furikake seasoning",
        "instructions": "1. Cook brown rice. 2. Roast sweet potato cubes with olive oil at 400°F "
        "for 25 min. 3. Arrange all ingredients in a bowl mindfully. 4. Drizzle with sesame "
        "dressing and sprinkle furikake.",
        "prep_time": "35 minutes",
        "servings": 2,
        "image": "🧘🥗",
    },
    {
        "name": "Tuscan White Bean Soup",
        "mood": "relaxed",
        "ingredients": "Cannellini beans, Kale, Garlic, Rosemary, Thyme, Vegetable broth, "
        "Parmesan rind, Olive oil, Crusty bread",
        "instructions": "1. Sauté garlic and herbs in olive oil. 2. Add beans and broth with "
        "parmesan rind. 3. Simmer 30 minutes. 4. Stir in chopped kale until wilted. 5. Serve "
        "with crusty bread and good olive oil.",
        "prep_time": "45 minutes",
        "servings": 6,
        "image": "🫘🌿",
    },
    # Adventurous
    {
        "name": "Korean BBQ Tacos",
        "mood": "adventurous",
        "ingredients": "Beef bulgogi, Corn tortillas, Kimchi, Sesame seeds, Green onions, "
        "Sriracha mayo, Cilantro",
        "instructions": "1. Marinate and grill beef bulgogi. 2. Warm tortillas. 3. Fill with "
        "beef, kimchi, and toppings. 4. Drizzle with sriracha mayo.",
        "prep_time": "35 minutes",
        "servings": 4,
        "image": "🌮🎉",
    },
    {
        "name": "Moroccan Tagine",
        "mood": "adventurous",
        "ingredients": "Lamb or chicken, Chickpeas, Apricots, Onions, Tomatoes, Cumin, Cinnamon, "
        "Coriander, Couscous",
        "instructions": "1. Brown meat with spices. 2. Add vegetables and dried fruit. 3. Simmer "
        "1 hour until tender. 4. Serve over couscous.",
        "prep_time": "90 minutes",
        "servings": 6,
        "image": "🍲🌍",
    },
    {
        "name": "Sushi Roll Bowl",
        "mood": "adventurous",
        "ingredients": "Sushi rice, Nori sheets (crumbled), Salmon or tuna, Avocado, Cucumber, "
        "Edamame, Soy sauce, Wasabi, Pickled ginger",
        "instructions": "1. Cook sushi rice and season. 2. Arrange rice in bowl. 3. Top with "
        "fish, vegetables, and nori. 4. Serve with soy sauce and wasabi.",
        "prep_time": "30 minutes",
        "servings": 2,
        "image": "🍣🌊",
    },
    {
        "name": "Miso Butter Ramen Burger",
        "mood": "adventurous",
        "ingredients": "Ramen noodles, Ground beef, Miso paste, Butter, Nori sheets, Soft-boiled "
        "egg, Japanese mayo, Sriracha, Green onions",
        "instructions": "1. Form cooked ramen into buns and pan-fry until crispy. 2. Mix beef "
        "with miso and form patty. 3. Grill burger and top with miso butter. 4. Assemble with "
        "egg, mayo-sriracha, and green onions on ramen buns.",
        "prep_time": "40 minutes",
        "servings": 2,
        "image": "🍜🍔",
    },
    {
        "name": "Ethiopian Doro Wat with Injera",
        "mood": "adventurous",
        "ingredients": "Chicken thighs, Berbere spice, Red onions, Garlic, Ginger, Tomato paste, "
        "Hard-boiled eggs, Clarified butter, Injera flatbread",
        "instructions": "1. Sauté onions until caramelized. 2. Add berbere, garlic, ginger, and "
        "tomato paste. 3. Add chicken and simmer 45 minutes. 4. Add peeled hard-boiled eggs and "
        "cook 10 more minutes. 5. Serve on injera.",
        "prep_time": "90 minutes",
        "servings": 4,
        "image": "🇪🇹🍛",
    },
    {
        "name": "Matcha Tiramisu",
        "mood": "adventurous",
        "ingredients": "Ladyfinger cookies, Mascarpone cheese, Eggs, Sugar, Matcha powder, "
        "Strong espresso, Cocoa powder, White chocolate shavings",
        "instructions": "1. Whip egg yolks with sugar, fold in mascarpone. 2. Beat egg whites to "
        "stiff peaks and fold in. 3. Mix matcha with espresso. 4. Layer dipped ladyfingers with "
        "cream mixture. 5. Dust with matcha and cocoa, top with white chocolate.",
        "prep_time": "30 minutes + chill time",
        "servings": 8,
        "image": "🍵🍰",
    },
]
